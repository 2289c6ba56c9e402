"""
Result - wrapper explícito de sucesso/falha

Usado nas fronteiras da aplicação no lugar de exceções: quem chama
verifica `success` e lê `payload` ou `error`.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    success: bool
    payload: Optional[P] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, payload: P) -> 'Result[P]':
        return cls(success=True, payload=payload)

    @classmethod
    def fail(cls, error: str) -> 'Result[P]':
        return cls(success=False, error=error)
