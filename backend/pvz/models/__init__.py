from .auth import User
from .pickup_points import PickupPoint
from .receptions import Reception, Product

__all__ = [
    'User',
    'PickupPoint',
    'Reception', 'Product',
]
