"""Console demo of simple user and product models and small utilities."""