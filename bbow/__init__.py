from .bag import Bag
from .tokenizer import Ownership, tokenize

__all__ = ["Bag", "Ownership", "tokenize"]
