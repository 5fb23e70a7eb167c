# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import find_packages, setup


setup(
  name='tagtree',
  version='0.0.1',
  description='tagtree builds HTML documents from composable constructor functions and renders them to text.',
  python_requires='>=3.10',

  packages=find_packages(include=['tagtree', 'tagtree.*']),
  extras_require={
    'web': ['starlette', 'python-multipart', 'uvicorn'],
    'test': ['pytest', 'starlette', 'python-multipart', 'httpx'],
  },
  entry_points={
    'console_scripts': [
      'tagtree-todoapp=tagtree.web.todoapp:main',
      'tagtree-helloapp=tagtree.web.helloapp:main',
    ],
  },
)
