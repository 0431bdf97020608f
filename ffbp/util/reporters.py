""" This module provides reporters that can be used as the `reporter`
argument of :meth:`ffbp.core.network.NeuralNetwork.evaluate`. A reporter
is any callable with signature::

    reporter(inputs, outputs, targets)
"""
import logging

import numpy


logger = logging.getLogger(__name__)


def format_report(inputs, outputs, targets):
    """ Format a single evaluation result as
    :code:`"<inputs> -> <outputs> : <targets>"`
    """
    return "{} -> {} : {}".format(
        numpy.asarray(inputs).tolist(),
        numpy.asarray(outputs).tolist(),
        numpy.asarray(targets).tolist())


def log_reporter(log=None, level=logging.INFO):
    """ Writes each evaluation result to the logger `log` (the default of
    None uses this module's logger) at the given `level`
    """
    log = log if log is not None else logger

    def reporter(inputs, outputs, targets):
        log.log(level, format_report(inputs, outputs, targets))

    return reporter


def collect_reports(report_list):
    """ Collects the evaluation results as `(inputs, outputs, targets)`
    tuples appended to :code:`report_list`. Usage::

        reports = []
        net.evaluate(examples, reporter=collect_reports(reports))
    """

    def reporter(inputs, outputs, targets):
        report_list.append((inputs, outputs, targets))

    return reporter
