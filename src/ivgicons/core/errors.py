class IconError(Exception):
    """Base class for errors that make a single icon unusable. The generator
    catches these at the icon boundary and carries on with the next icon.
    """


class ParseError(IconError):
    pass


class RegisterOverflowError(IconError):
    pass


class IconReadError(IconError):
    pass


class SkipIcon(Exception):
    """Raised when the skip policy excludes a whole icon file. This is not a
    failure: skipped icons are counted separately.
    """
