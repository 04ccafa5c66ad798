pytest_plugins = [
    "ecs_cli_integ.testing.pytest.fixtures",
    "ecs_cli_integ.testing.pytest.marking",
]
