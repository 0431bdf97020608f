# flake8: noqa

from ._version import version as __version__

from .core.exception import InputSizeMismatch
from .core.network import NeuralNetwork
