from clove.extensions.channels import import_channels
from clove.extensions.coroutines import import_coroutines

__all__ = ["import_channels", "import_coroutines"]
