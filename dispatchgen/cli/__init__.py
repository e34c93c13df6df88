""" Command line utilities of dispatchgen """
