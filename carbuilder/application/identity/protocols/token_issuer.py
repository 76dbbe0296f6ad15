from typing import Protocol

from carbuilder.domain.identity.principal import Principal


class TokenIssuerProtocol(Protocol):
    def generate_token(self, principal: Principal) -> str: ...

    def verify_token(self, token: str) -> Principal: ...
