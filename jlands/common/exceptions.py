class TraversalArgumentError(ValueError):
    """ Traversal Argument Error

        This is raised before a traversal begins when one of its arguments is missing or unusable.
    """
    def __init__(self, argument_name: str, reason: str = 'is required'):
        super().__init__(f'The argument "{argument_name}" {reason}.')
        self.argument_name = argument_name


class FillerError(RuntimeError):
    """ Raised when a mock-data filler is misconfigured """
