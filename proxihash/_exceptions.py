class InvalidArgument(ValueError): ...


class InvalidPrecision(InvalidArgument): ...


class PoleWrapError(ValueError): ...
