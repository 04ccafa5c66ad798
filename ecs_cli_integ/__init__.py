from ecs_cli_integ.version import __version__  # noqa: F401
