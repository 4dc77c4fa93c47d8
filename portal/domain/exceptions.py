from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class EmailAlreadyExistsError(DomainError):
    """Email ja cadastrado."""


class InvalidCredentialsError(DomainError):
    """Credenciais invalidas."""


class UserInactiveError(DomainError):
    """Usuario inativo."""


class RefreshSessionInvalidError(DomainError):
    """Sessao de refresh invalida, expirada ou revogada."""


class AdminRequiredError(DomainError):
    """Operacao restrita a administradores."""


class PlanNotFoundError(DomainError):
    """Plano solicitado nao existe."""


class PlanUnavailableError(DomainError):
    """Plano inativo nao pode ser contratado."""


class OrderNotFoundError(DomainError):
    """Pedido nao existe ou nao pertence ao usuario."""


class OrderTransitionError(DomainError):
    """Transicao de status de pedido nao permitida."""


class TicketInputError(DomainError):
    """Parametros invalidos para abertura ou resposta de ticket."""


class TicketNotFoundError(DomainError):
    """Ticket nao existe ou nao pertence ao usuario."""


class TicketTransitionError(DomainError):
    """Ticket ja respondido nao aceita nova resposta."""


class NotificationError(DomainError):
    """Falha ao enviar notificacao externa."""
