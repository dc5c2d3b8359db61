from setuptools import setup

setup(name='depgraph',
      version='0.1.0',
      description='Typed-dependency graphs from free text: sentence splitting, parsing with stanza, root normalization and attributed networkx graphs.',
      packages=['depgraph'],
      python_requires='>=3.8',
      install_requires=['fire',
                        'networkx',
                        'numpy',
                        'stanza',
                        'tqdm'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['depgraph=depgraph.parser:cli']})
