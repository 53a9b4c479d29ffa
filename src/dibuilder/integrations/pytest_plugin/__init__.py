from dibuilder.integrations.pytest_plugin.plugin import dibuilder, dibuilder_container

__all__ = ["dibuilder", "dibuilder_container"]
