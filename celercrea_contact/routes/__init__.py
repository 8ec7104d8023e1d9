from .contact_routes import contact_bp
from .core_routes import core
