class ShortlyError(Exception): pass


class InvalidArgument(ShortlyError, ValueError): pass


class NotFound(ShortlyError, LookupError): pass
