import logging

import numpy
from sklearn.utils import check_random_state

from ffbp.activation import dsigmoid, identity, sigmoid
from ffbp.score_functions import sum_squared_error
from ffbp.util.reporters import log_reporter
from .exception import INPUT_KIND, TARGET_KIND, InputSizeMismatch
from .logger import progress_message


logger = logging.getLogger(__name__)

DEFAULT_LEARNING_RATE = 0.5
DEFAULT_MOMENTUM_FACTOR = 0.1
DEFAULT_LOG_EVERY = 100


class NeuralNetwork:
    """
    Feed-forward neural network with a single hidden layer of sigmoid
    units, trained by online backpropagation with momentum.

    The input and hidden layers each carry one extra bias unit, stored in
    the last slot of the respective activation vector and held at 1.0.
    The output units are sigmoid units, or linear units when the network
    is built for regression.

    params: input_weights, where input_weights[i, j] = weight from input
                unit i to hidden unit j.
            output_weights, where output_weights[j, k] = weight from hidden
                unit j to output unit k.

    For a single vector input, the computation chain is::

        hidden = sigmoid(dot([input, 1], input_weights))
        output = sigmoid(dot([hidden, 1], output_weights))

    where the final sigmoid is omitted for regression.
    """

    def __init__(self, n_input, n_hidden, n_output, regression=False,
                 random_state=None):
        """
        Parameters
        ----------
        n_input: int
            Number of input units (not counting the bias unit).

        n_hidden: int
            Number of hidden units (not counting the bias unit).

        n_output: int
            Number of output units.

        regression: bool, default=False
            If True, the output units compute the identity rather than the
            sigmoid, so outputs are not restricted to (0, 1).

        random_state: None, int, or numpy.random.RandomState, default=None
            Source of randomness for the initial weights. Provide an int
            or a RandomState object for reproducible results.
        """
        for name, count in (('n_input', n_input),
                            ('n_hidden', n_hidden),
                            ('n_output', n_output)):
            if count < 0:
                msg = "`{}` must be non-negative (got {})"
                raise ValueError(msg.format(name, count))

        self.n_input_units = int(n_input) + 1
        self.n_hidden_units = int(n_hidden) + 1
        self.n_output_units = int(n_output)
        self.regression = bool(regression)
        self.random_state = check_random_state(random_state)

        self.input_activations = numpy.ones(self.n_input_units)
        self.hidden_activations = numpy.ones(self.n_hidden_units)
        self.output_activations = numpy.ones(self.n_output_units)

        # This both initializes and randomizes the weights and momentum.
        self.randomize_params()

    def __repr__(self):
        return "<NeuralNetwork n_input=%d, n_hidden=%d, n_output=%d%s>" % (
            self.n_input, self.n_hidden, self.n_output,
            ", regression" if self.regression else "")

    @property
    def n_input(self):
        return self.n_input_units - 1

    @property
    def n_hidden(self):
        return self.n_hidden_units - 1

    @property
    def n_output(self):
        return self.n_output_units

    def randomize_params(self):
        """
        Draw the weights from the uniform distribution on [-1, 1) using
        the network's random state and reset the momentum buffers to zero.
        """
        input_shape = (self.n_input_units, self.n_hidden_units)
        output_shape = (self.n_hidden_units, self.n_output_units)

        self.input_weights = self.random_state.uniform(
            -1.0, 1.0, size=input_shape)
        self.output_weights = self.random_state.uniform(
            -1.0, 1.0, size=output_shape)

        # The last weight changes, used for the momentum term.
        self.input_momentum = numpy.zeros(input_shape)
        self.output_momentum = numpy.zeros(output_shape)

    def get_params(self):
        """
        Returns
        -------
        params: list
            The weight arrays, [input_weights, output_weights]. These are
            the arrays owned by the network, not copies.
        """
        return [self.input_weights, self.output_weights]

    def set_params(self, input_weights, output_weights):
        """
        Copy the provided weight values into the network's weight arrays.
        The momentum buffers are left as they are.
        """
        input_weights = numpy.asarray(input_weights, dtype=numpy.float64)
        output_weights = numpy.asarray(output_weights, dtype=numpy.float64)

        if input_weights.shape != self.input_weights.shape:
            msg = "`input_weights` is shape {} but should be {}"
            raise ValueError(msg.format(input_weights.shape,
                                        self.input_weights.shape))

        if output_weights.shape != self.output_weights.shape:
            msg = "`output_weights` is shape {} but should be {}"
            raise ValueError(msg.format(output_weights.shape,
                                        self.output_weights.shape))

        self.input_weights[...] = input_weights
        self.output_weights[...] = output_weights

    def _as_vector(self, values, size, kind):
        values = numpy.asarray(values, dtype=numpy.float64)

        if values.shape != (size,):
            actual = len(values) if values.ndim == 1 else values.shape
            raise InputSizeMismatch(kind, size, actual)

        return values

    def predict(self, inputs):
        """
        Run the forward pass for a single example.

        Parameters
        ----------
        inputs: array-like, shape=(n_input,)
            The input values.

        Returns
        -------
        outputs: ndarray, shape=(n_output,)
            The output activations. This is the network's own activation
            array and is overwritten by the next call to `predict`; copy it
            if it must be kept.

        Raises
        ------
        InputSizeMismatch
            If `inputs` doesn't have length `n_input`. No activations are
            changed in this case.
        """
        inputs = self._as_vector(inputs, self.n_input, INPUT_KIND)

        self.input_activations[:-1] = inputs

        # The hidden bias unit (the last one) is left at 1.0.
        self.hidden_activations[:-1] = sigmoid(
            numpy.dot(self.input_activations, self.input_weights[:, :-1]))

        activate = identity if self.regression else sigmoid
        self.output_activations[:] = activate(
            numpy.dot(self.hidden_activations, self.output_weights))

        return self.output_activations

    def back_propagate(self, targets, learning_rate, momentum_factor):
        """
        Update the weights from the error between `targets` and the output
        activations of the preceding call to `predict`.

        Parameters
        ----------
        targets: array-like, shape=(n_output,)
            The desired output values.

        learning_rate: float
            Scales the current weight change.

        momentum_factor: float
            Scales the previous weight change, which is added on top of the
            current one.

        Returns
        -------
        error: float
            Half the sum of squared differences between `targets` and the
            output activations, i.e., the error before this update.

        Raises
        ------
        InputSizeMismatch
            If `targets` doesn't have length `n_output`. No weights or
            momentum values are changed in this case.
        """
        targets = self._as_vector(targets, self.n_output, TARGET_KIND)

        output_deltas = targets - self.output_activations
        if not self.regression:
            output_deltas *= dsigmoid(self.output_activations)

        # Back-propagated through the weights before they're updated.
        hidden_deltas = (dsigmoid(self.hidden_activations) *
                         numpy.dot(self.output_weights, output_deltas))

        change = numpy.outer(self.hidden_activations, output_deltas)
        self.output_weights += (learning_rate * change +
                                momentum_factor * self.output_momentum)
        self.output_momentum[...] = change

        change = numpy.outer(self.input_activations, hidden_deltas)
        self.input_weights += (learning_rate * change +
                               momentum_factor * self.input_momentum)
        self.input_momentum[...] = change

        return sum_squared_error(self.output_activations, targets)

    def train(self, examples, iterations,
              learning_rate=DEFAULT_LEARNING_RATE,
              momentum_factor=DEFAULT_MOMENTUM_FACTOR,
              on_iterate=None, log_every=DEFAULT_LOG_EVERY):
        """
        Run `iterations` passes of online gradient descent over `examples`.

        Parameters
        ----------
        examples: list of (inputs, targets) pairs
            The training examples, visited in the given order on every
            iteration.

        iterations: int
            The number of passes over `examples`. Exactly this many are
            run; there is no early stopping.

        learning_rate: float, default=0.5
            See :meth:`back_propagate`.

        momentum_factor: float, default=0.1
            See :meth:`back_propagate`.

        on_iterate: callable or list of callables, default=None
            Called as :code:`on_iterate(i, error)` after each iteration.
            See :mod:`ffbp.util.on_iterate`.

        log_every: int, default=100
            Log the iteration error at debug level every `log_every`
            iterations. Zero disables this.

        Returns
        -------
        errors: ndarray, shape=(iterations,)
            The error summed over `examples` for each iteration.
        """
        if int(iterations) != iterations or iterations < 1:
            msg = "`iterations` must be a positive integer (got {})"
            raise ValueError(msg.format(iterations))
        iterations = int(iterations)

        if learning_rate < 0:
            msg = "`learning_rate` must be non-negative (got {})"
            raise ValueError(msg.format(learning_rate))

        if momentum_factor < 0:
            msg = "`momentum_factor` must be non-negative (got {})"
            raise ValueError(msg.format(momentum_factor))

        if on_iterate is None:
            on_iterate = []
        elif callable(on_iterate):
            on_iterate = [on_iterate]

        if not all(callable(func) for func in on_iterate):
            raise TypeError("`on_iterate` should be a callable or "
                            "list of callables")

        examples = list(examples)

        msg = "Training {} for {} iterations on {} examples"
        logger.info(msg.format(self, iterations, len(examples)))

        errors = numpy.zeros(iterations)

        for i in range(iterations):
            error = 0.0
            for inputs, targets in examples:
                self.predict(inputs)
                error += self.back_propagate(
                    targets, learning_rate, momentum_factor)

            errors[i] = error

            if log_every and (i + 1) % log_every == 0:
                msg = "Error: {:.6f}".format(error)
                logger.debug(progress_message(msg, i + 1, iterations))

            for func in on_iterate:
                func(i, error)

        msg = "Training finished with error {:.6f} (initial {:.6f})"
        logger.info(msg.format(errors[-1], errors[0]))

        return errors

    def evaluate(self, examples, reporter=None):
        """
        Run the forward pass on each example and report the result.

        Parameters
        ----------
        examples: list of (inputs, targets) pairs
            The examples to evaluate.

        reporter: callable, default=None
            Called as :code:`reporter(inputs, outputs, targets)` for each
            example, with a copy of the output activations. The default
            (None) logs each result; see :mod:`ffbp.util.reporters`.
        """
        reporter = reporter if reporter is not None else log_reporter()

        for inputs, targets in examples:
            outputs = self.predict(inputs).copy()
            reporter(inputs, outputs, targets)

    def score(self, examples, score_func=sum_squared_error):
        """
        Score the network's predictions over `examples`.

        Parameters
        ----------
        examples: list of (inputs, targets) pairs
            The examples to score.

        score_func: function, default=sum_squared_error
            Has signature::

                score_func(outputs, targets)

            where both arguments are arrays of shape
            (n_examples, n_output). See :mod:`ffbp.score_functions`.

        Returns
        -------
        score: float
            The value of `score_func`.
        """
        outputs = []
        targets = []

        for inputs, target in examples:
            outputs.append(self.predict(inputs).copy())
            targets.append(
                self._as_vector(target, self.n_output, TARGET_KIND))

        outputs = numpy.array(outputs).reshape(-1, self.n_output)
        targets = numpy.array(targets).reshape(-1, self.n_output)

        return score_func(outputs, targets)
