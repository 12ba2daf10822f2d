""" Command line utilities of nescprint """
