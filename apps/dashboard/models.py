# Django discovers models here; they live in the infrastructure layer.
from .infrastructure.models import SystemEventModel  # noqa: F401
