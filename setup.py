from setuptools import setup, find_packages

version = '0.1'

setup(name='listeditor',
      version=version,
      description="AJAX list editors (generated CRUD actions and list helpers) for Pyramid",
      long_description="""\
""",
      classifiers=[], # Get strings from http://pypi.python.org/pypi?%3Aaction=list_classifiers
      keywords='pyramid crud list editor',
      author='Sergey Volobuev',
      author_email='sergey.volobuev@gmail.com',
      url='',
      license='GPL',
      packages=find_packages(exclude=['ez_setup', 'examples', 'tests']),
      include_package_data=True,
      package_data={'listeditor': ['templates/*.pt', 'tests/templates/*.pt']},
      zip_safe=False,
      install_requires=[
          # -*- Extra requirements: -*-
        'pyramid',
        'pyramid_chameleon',
        'zope.interface',
        'SQLAlchemy',
      ],
      extras_require={
        'test': ['pytest'],
      },
      entry_points="""
      # -*- Entry points: -*-
      """,
      )
