"""Exceptions raised by xmltester.

Most failures are reported as assertion records (see ``core.reporter``); the
exceptions here are the ones that halt the current test.
"""


class XmlTesterError(Exception):
    """Base class for all xmltester errors."""


class ConfigurationError(XmlTesterError, ValueError):
    """Raised when the tester is missing configuration it needs, e.g. an
    unqualified type is used while no default namespace is set."""


class CompileFailure(XmlTesterError):
    """Raised when the schema collaborator could not compile a reader or writer."""


class UnknownTypeError(XmlTesterError, LookupError):
    """Raised by a schema collaborator for a type it does not know."""


class TemplateError(XmlTesterError):
    """Raised when a template cannot be produced for a type."""
