# -*- coding: utf-8 -*-


def init_pytest_suite():
    """
    Call at import time of a test module.
    Turns warnings into errors.
    """
    import warnings
    warnings.simplefilter('error')
