def clip_discord_message(text: str, limit: int = 1900) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def role_mention(role_id: str | None) -> str:
    return f"<@&{role_id}>" if role_id else ""


def channel_mention(channel_id: str | int) -> str:
    return f"<#{channel_id}>"
