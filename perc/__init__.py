from perc.nn import Perceptron, classify, train
