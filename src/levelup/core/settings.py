"""User settings and the prompt prefix derived from them - no I/O dependencies."""

from dataclasses import asdict, dataclass


@dataclass
class UserSettings:
    """What the user has told the assistant about themselves."""

    full_name: str = ""
    nickname: str = ""
    preferences: str = ""

    def prompt_prefix(self) -> str:
        """
        Text block sent ahead of chat prompts.

        Blank fields are left out; all-blank settings give an empty string.
        """
        full_name = self.full_name.strip()
        nickname = self.nickname.strip()
        preferences = self.preferences.strip()

        blocks = []
        if full_name or nickname:
            lines = ["About the user:"]
            if full_name:
                lines.append(f"- Name: {full_name}")
            if nickname:
                lines.append(f"- Nickname: {nickname}")
            blocks.append("\n".join(lines))

        if preferences:
            blocks.append(f"User preferences:\n{preferences}")

        return "\n\n".join(blocks)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "UserSettings":
        return cls(
            full_name=str(data.get("full_name") or ""),
            nickname=str(data.get("nickname") or ""),
            preferences=str(data.get("preferences") or ""),
        )
