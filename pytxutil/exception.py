class PyTxUtilException(Exception):
    pass


class InvalidArgumentException(PyTxUtilException):
    pass


class MalformedSequenceException(PyTxUtilException):
    pass
