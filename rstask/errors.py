"""Exceptions raised by rstask."""


class RstaskError(Exception):
    """Base class for rstask errors"""


class ParseError(RstaskError):
    """Task file text could not be turned into a Task"""


class FormatError(RstaskError):
    """Task could not be rendered as task file text"""
