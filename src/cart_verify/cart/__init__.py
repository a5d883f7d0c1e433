# Cart package
from .consistency import CartConsistencyModel
from .driver import CartDriver
from .models import CartSnapshot, LineItem

__all__ = ['CartConsistencyModel', 'CartDriver', 'CartSnapshot', 'LineItem']
