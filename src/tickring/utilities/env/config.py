from tickring.utilities.env.display import DisplayConfiguration
from tickring.utilities.env.rendering import RenderingConfiguration


class Configuration(
    RenderingConfiguration,
    DisplayConfiguration,
):
    """Aggregate environment configuration helpers."""
