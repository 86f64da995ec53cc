"""
Wizard state models produced by the decision engine.
"""
from dataclasses import dataclass
from typing import Optional, Tuple
from product_configurator.data.models.product import Product


@dataclass(frozen=True)
class Option:
    """
    One clickable answer to a question.
    """
    label: str
    value: str
    picture: str  # Image of a representative product


@dataclass(frozen=True)
class QuestionState:
    """
    The next question to present to the user.
    """
    attribute: str
    question: str
    options: Tuple[Option, ...]


@dataclass(frozen=True)
class EngineResult:
    """
    Outcome of one engine call: either a question or a final product list.
    """
    current_question: Optional[QuestionState] = None
    final_products: Optional[Tuple[Product, ...]] = None

    def __post_init__(self):
        if (self.current_question is None) == (self.final_products is None):
            raise ValueError("EngineResult needs exactly one of current_question or final_products")

    @classmethod
    def question(cls, question: QuestionState) -> "EngineResult":
        return cls(current_question=question)

    @classmethod
    def final(cls, products) -> "EngineResult":
        return cls(final_products=tuple(products))

    @property
    def is_final(self) -> bool:
        return self.final_products is not None
