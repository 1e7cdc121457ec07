"""LinkedIn post text built from a handful of catalog icons."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from jinja2 import DictLoader, Environment, StrictUndefined
from slugify import slugify

from .catalog import Catalog, lookup_icons
from .schemas import CatalogEntry, PostRead, SelectedIcon

DEFAULT_TEMPLATE = "tools-spotlight"
DEFAULT_EMOJI = "⭐"

ICON_EMOJIS: dict[str, str] = {
    "openai": "🤖",
    "claude": "🧠",
    "github": "🐙",
    "figma": "🎨",
    "google": "🔍",
    "microsoft": "🪟",
    "aws": "☁️",
    "azure": "🔵",
    "docker": "🐳",
    "kubernetes": "⚓",
    "mongodb": "🍃",
    "postgresql": "🐘",
    "linkedin": "💼",
    "twitter": "🐦",
}

_ICON_LIST = "{% for icon in icons %}• {{ icon.display_name }}\n{% endfor %}"
_EMOJI_LINE = "{{ emojis | join(' ') }}"

POST_TEMPLATES: dict[str, str] = {
    "tools-spotlight": (
        "🌟 Amazing tools that are transforming how we work:\n\n"
        + _ICON_LIST
        + "\nThese tools have revolutionized productivity and creativity in their respective domains. "
        "Each one brings unique capabilities that help teams and individuals achieve more.\n\n"
        "What's your favorite tool from this list? Share your experience in the comments! 👇\n\n"
        + _EMOJI_LINE
        + "\n\n#TechTools #Innovation #Productivity #TechStack"
    ),
    "tech-stack": (
        "🛠️ My current tech stack:\n\n"
        + _ICON_LIST
        + "\nThis combination has been incredibly powerful for building scalable, maintainable solutions. "
        "Each tool plays a crucial role in the development lifecycle.\n\n"
        "What does your tech stack look like? Drop it in the comments! 💻\n\n"
        + _EMOJI_LINE
        + "\n\n#TechStack #Development #Engineering #SoftwareDevelopment"
    ),
    "comparison": (
        "⚖️ Comparing some popular tools in the market:\n\n"
        + _ICON_LIST
        + "\nEach of these tools has its strengths and ideal use cases. The choice often depends on:\n"
        "• Team size and expertise\n"
        "• Project requirements\n"
        "• Budget considerations\n"
        "• Integration needs\n"
        "• Long-term scalability\n\n"
        "Have you used any of these? What's been your experience? 🤔\n\n"
        + _EMOJI_LINE
        + "\n\n#TechComparison #ToolSelection #TechDecisions"
    ),
    "trend-analysis": (
        "📈 Trending technologies worth watching:\n\n"
        + _ICON_LIST
        + "\nThese tools are gaining significant traction in the tech community.\n\n"
        "Which one are you most excited about? Let me know! 🎯\n\n"
        + _EMOJI_LINE
        + "\n\n#TechTrends #Innovation #FutureTech #Technology"
    ),
}

_env = Environment(
    loader=DictLoader(POST_TEMPLATES),
    autoescape=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


def available_templates() -> list[str]:
    return list(POST_TEMPLATES)


def icon_emoji(name: str) -> str:
    return ICON_EMOJIS.get(name.lower(), DEFAULT_EMOJI)


def render_post(template: str, icons: list[CatalogEntry]) -> str:
    """Fill a post template; unknown templates get a one-line shout-out."""
    key = slugify(template)
    if key not in POST_TEMPLATES:
        names = ", ".join(icon.display_name for icon in icons)
        return f"Check out these amazing tools: {names}!"
    return _env.get_template(key).render(
        icons=icons,
        emojis=[icon_emoji(icon.name) for icon in icons],
    )


def generate_post(catalog: Catalog, icon_names: Iterable[str], template: str = DEFAULT_TEMPLATE) -> PostRead:
    icons = lookup_icons(catalog, icon_names)
    post = render_post(template, icons)
    return PostRead(
        template=template,
        selected_icons=[
            SelectedIcon(name=icon.name, display_name=icon.display_name, category=icon.category)
            for icon in icons
        ],
        post=post,
        characters_count=len(post),
        generated_at=datetime.now(timezone.utc),
    )
