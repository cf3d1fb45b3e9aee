from .animal import Animal
from .cat import Cat
from .dog import Dog
