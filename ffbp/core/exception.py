INPUT_KIND = 'input'
TARGET_KIND = 'target'


class InputSizeMismatch(ValueError):
    """ Raised when an input or target vector does not have the length
    the network was constructed with
    """

    def __init__(self, kind, expected, actual):
        self.kind = kind
        self.expected = expected
        self.actual = actual

        msg = "Wrong number of {} values: expected {}, got {}"
        super().__init__(msg.format(kind, expected, actual))
