from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup, escape

from ..services.resend import send_email


def nl2br(value: str) -> Markup:
    return Markup("<br>").join(escape(value).split("\n"))


env = Environment(loader=FileSystemLoader(Path(__file__).parent / "../templates"), autoescape=True)
env.filters["nl2br"] = nl2br


@dataclass
class Message:
    title: str
    template: str

    def render(self, **kwargs: Any) -> tuple[str, str]:
        return self.title.format(**kwargs), env.get_template(self.template).render(**kwargs)

    async def send(self, recipients: list[str], *, reply_to: str | None = None, **kwargs: Any) -> dict[str, Any]:
        subject, content = self.render(**kwargs)
        return await send_email(recipients, subject, content, reply_to=reply_to)


CONTACT_SUBMISSION = Message(title="New Contact Form Submission from {name}", template="contact.html")
