from setuptools import setup, find_packages

setup(
    name='zengincode',
    use_scm_version={'fallback_version': '0.1.0'},
    description='Japanese Bank and Branch Code Lookup',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={'zengincode': ['data/*.json', 'data/branches/*.json']},
    python_requires='>=3.7',
    install_requires=['mojimoji'],
    extras_require={'test': ['pytest']},
    setup_requires=['setuptools-scm'],
)
