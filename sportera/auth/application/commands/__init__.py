"""Auth Commands."""

from sportera.auth.application.commands.login import LoginInteractor
from sportera.auth.application.commands.register import RegisterAccountInteractor

__all__ = ["RegisterAccountInteractor", "LoginInteractor"]
