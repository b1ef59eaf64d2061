"""Gating function exceptions"""


class InvalidParameterError(ValueError):
    """Raised if the boundary values of a gating function cannot define it.

    Parameters
    ----------
    message : str
        Error message

    Attributes
    ----------
    message : str
        Error message
    """

    def __init__(self, message: str):
        """Instantiate an error object from the error descriptive message.

        Parameters
        ----------
        message : str
            Error message
        """
        super().__init__(message)
        self.message = message
