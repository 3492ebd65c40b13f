from .dtos import TokensOutput
from .login import LoginUseCase
from .refresh_token import RefreshTokenUseCase

__all__ = ["LoginUseCase", "RefreshTokenUseCase", "TokensOutput"]
