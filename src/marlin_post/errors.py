class PostError(Exception):
    """Generation was aborted, the partial program must not be used"""


class UnsupportedFeature(PostError, NotImplementedError):
    """The job asks for something this machine can not do, e.g. rotary axes"""


class InvalidConfiguration(PostError, ValueError):
    """The job or the post configuration can not be turned into a program"""
