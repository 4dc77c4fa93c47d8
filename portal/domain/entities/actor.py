from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """Identidade de quem executa a operacao.

    Passada explicitamente para cada caso de uso e para os repositorios, que
    restringem as consultas ao `user_id` do ator quando ele nao e admin.
    """

    user_id: str
    email: str
    name: str
    is_admin: bool = False
