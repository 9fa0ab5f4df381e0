__version__ = '0.1.0'


from .counter import Counter
from .log import setup_logging
