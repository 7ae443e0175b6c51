from setuptools import setup

setup(name='perc',
      version='0.0.1',
      description='Perceptron',
      install_requires=['numpy', 'autograd', 'matplotlib'],
      extras_require={'examples': ['scikit-learn'],
                      'test': ['pytest']},
      packages=['perc', 'perc.nn'],
      zip_safe=False,
)
