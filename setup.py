import os
from setuptools import setup, find_packages

# User-friendly description from README.md
current_directory = os.path.dirname(os.path.abspath(__file__))
try:
    with open(os.path.join(current_directory, 'README.md'), encoding='utf-8') as f:
        long_description = f.read()
except Exception:
   long_description = ''

setup(
   name='prodreport',
   version='1.0.0',
   description='Production reports from machine ON / OFF events and dispatched products',
   license="MIT",
   long_description=long_description,
   long_description_content_type='text/markdown',
   packages=find_packages(exclude=['tests', 'tests.*', 'examples', 'examples.*']),
   py_modules=['prodreport_api'],
   package_data={'prodreport': ['conf/logging.ini']},
   include_package_data=True,
   python_requires='>=3.9',
   install_requires=[
   'pydantic>=2.11',
   'fastapi>=0.110',
   'uvicorn>=0.20.0',
   'pandas>=2.0',
   'openpyxl>=3.1',
   'hydra-core>=1.3.2',
   'importlib_metadata>=6.0',
    ], #external packages as dependencies
   extras_require={
      'test': ['pytest>=7.0', 'httpx>=0.24'],
   },
)
