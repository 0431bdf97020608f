""" This module provides a few simple `on_iterate` functions that can be
used in the NeuralNetwork.train member function. Each has signature::

    on_iterate(i, error)

where `i` is the (zero-based) iteration number and `error` is the total
error over the training examples for that iteration.
"""
import logging

from ffbp.core.logger import progress_message


logger = logging.getLogger(__name__)


def collect_errors(error_list):
    """ Collects the errors from the iterations. Errors are appended to
    :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        net.train(examples, iterations, on_iterate=collect_errors(errors))
    """

    def on_iterate(i, error):
        error_list.append(error)

    return on_iterate


def log_errors(every=100, n_iterations=None, log=None):
    """ Log the error every `every` iterations. If `n_iterations` is given
    then the messages are prefixed with a progress counter
    """
    if every < 1:
        msg = "`every` must be a positive integer (got {})"
        raise ValueError(msg.format(every))

    log = log if log is not None else logger

    def on_iterate(i, error):
        if (i + 1) % every != 0:
            return

        msg = "Error: {:.6f}".format(error)
        if n_iterations is not None:
            msg = progress_message(msg, i + 1, n_iterations)
        log.info(msg)

    return on_iterate


def plot_errors(line_kwargs=None, every=10, log_scale=True):
    """ Plot the error curve onto the current matplotlib axis, updating
    it every `every` iterations. :code:`line_kwargs` is a dictionary
    of keyword arguments that, if provided, is supplied to the `plot`
    function
    """

    import matplotlib.pyplot as plt
    kwargs = line_kwargs or {'color': 'red'}
    iterations = []
    errors = []
    line, = plt.plot([], [], **kwargs)

    if log_scale:
        plt.yscale('log')

    plt.xlabel('Iteration')
    plt.ylabel('Error')

    def on_iterate(i, error):
        iterations.append(i)
        errors.append(error)

        if (i + 1) % every != 0:
            return

        line.set_data(iterations, errors)
        ax = line.axes
        ax.relim()
        ax.autoscale_view()
        plt.pause(0.001)

    return on_iterate
