import setuptools

VERSION = '0.0.0'

test_requires = [
    'mockito>=1.4',
    'pytest>=7.0',
    'pytest-cov>=4.0',
    'ddt>=1.6',
]

setup_params = dict(
    name='ghrequests',
    version=VERSION,
    author='Kenneth VanderLinde',
    author_email='kwvanderlinde@gmail.com',
    keywords='github api requests cache pagination',
    packages=setuptools.find_namespace_packages(include=['ghrequests', 'ghrequests.*']),
    include_package_data=True,
    description='Cached, rate limit aware request pipeline for the GitHub REST API',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    install_requires=['requests>=2.28'],
    extras_require={
        'test': test_requires,
        'dev': test_requires,
    },
    entry_points={},
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Operating System :: OS Independent',

        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],
)


if __name__ == '__main__':
    setuptools.setup(**setup_params)
