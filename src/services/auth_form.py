"""Login / register form state for the sign-in screen."""
from dataclasses import dataclass

MIN_PASSWORD_LENGTH = 4


@dataclass
class LoginForm:
    mode: str = "login"  # "login" or "register"
    email: str = ""
    password: str = ""
    full_name: str = ""
    loading: bool = False

    @property
    def can_submit(self) -> bool:
        return (
            bool((self.email or "").strip())
            and len(self.password or "") >= MIN_PASSWORD_LENGTH
            and (self.mode == "login" or bool((self.full_name or "").strip()))
            and not self.loading
        )

    def switch_mode(self, mode: str) -> None:
        if mode not in ("login", "register"):
            raise ValueError(f"Unknown mode: {mode}")
        self.mode = mode
