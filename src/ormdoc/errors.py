"""Exceptions raised while loading annotator inputs."""


class SchemaError(ValueError):
    """The schema YAML does not have the expected shape."""


class ConfigError(ValueError):
    """The annotator config YAML does not have the expected shape."""
