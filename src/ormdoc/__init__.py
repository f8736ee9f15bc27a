"""ormdoc — docblock annotations for ORM-declared fields and relations."""

__version__ = "0.1.0"
