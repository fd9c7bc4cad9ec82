"""Core building blocks: enums, exceptions, configuration, naming, type registry."""
