"""Icon library tables for Composeon - categories, display names and search synonyms."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class Variation(str, Enum):
    DEFAULT = "default"
    COLOR = "color"
    TEXT = "text"
    BRAND = "brand"
    MONO = "mono"


OTHER_CATEGORY = "other"

# Checked in order; the first suffix that ends the stem wins.
VARIATION_SUFFIXES: tuple[tuple[str, Variation], ...] = (
    ("-color", Variation.COLOR),
    ("-text", Variation.TEXT),
    ("-brand", Variation.BRAND),
    ("-mono", Variation.MONO),
)

# Declaration order is the tie-break when a name matches several categories.
CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "ai": [
        "openai", "claude", "anthropic", "gemini", "chatgpt", "gpt", "midjourney",
        "stability", "huggingface", "deepseek", "cohere", "replicate", "runway",
        "perplexity", "character", "ai21", "ai2", "ai302", "ai360", "aihubmix",
        "aimass", "aionlabs", "aistudio", "akashchat", "alephalpha", "baai",
        "chatglm", "deepai", "deepcogito", "deepinfra", "deepmind", "doubao",
        "dreammachine", "elevenx", "essentialai", "glmv", "goose",
    ],
    "cloud": [
        "aws", "azure", "google", "googlecloud", "gcp", "digitalocean", "cloudflare",
        "heroku", "netlify", "vercel", "railway", "render", "supabase", "planetscale",
        "alibaba", "alibabacloud", "baidu", "baiducloud", "tencent", "huawei",
        "oracle", "ibm", "linode", "vultr", "hetzner", "baseten", "crusoe",
        "anyscale", "centml", "fireworks", "featherless", "friendli",
    ],
    "dev": [
        "github", "gitlab", "bitbucket", "vscode", "cursor", "jetbrains", "sublime",
        "atom", "vim", "docker", "kubernetes", "jenkins", "circleci", "travis",
        "copilot", "githubcopilot", "cline", "codeflicker", "codegeex", "commanda",
        "copilotkit", "greptile", "colab", "gradio",
    ],
    "framework": [
        "react", "vue", "angular", "svelte", "nextjs", "nuxt", "gatsby",
        "nodejs", "python", "javascript", "typescript", "java", "golang", "rust",
        "php", "ruby", "swift", "kotlin", "dart", "flutter", "unity", "unreal",
    ],
    "design": [
        "figma", "adobe", "sketch", "canva", "framer", "invision", "principle",
        "dribbble", "behance", "unsplash", "pexels", "clipdrop", "miro", "whimsical",
        "lucidchart", "webflow",
    ],
    "social": [
        "linkedin", "twitter", "facebook", "instagram", "youtube", "tiktok",
        "discord", "slack", "telegram", "whatsapp", "zoom", "teams", "meet",
        "webex", "skype", "twitch", "spotify", "netflix",
    ],
    "database": [
        "mongodb", "postgresql", "mysql", "redis", "elasticsearch", "cassandra",
        "neo4j", "sqlite", "snowflake", "databricks", "clickhouse", "cockroachdb",
    ],
    "browser": ["chrome", "firefox", "safari", "edge", "opera", "brave"],
    "crypto": ["bitcoin", "ethereum", "binance", "coinbase", "metamask"],
    "ecommerce": ["shopify", "stripe", "paypal", "square", "klarna", "razorpay", "adyen"],
    "productivity": [
        "notion", "obsidian", "todoist", "trello", "asana", "monday",
        "clickup", "airtable", "sheets", "excel", "word", "powerpoint",
    ],
    "security": ["nordvpn", "expressvpn", "1password", "bitwarden", "lastpass"],
}

SPECIAL_DISPLAY_NAMES: dict[str, str] = {
    "openai": "OpenAI",
    "chatgpt": "ChatGPT",
    "github": "GitHub",
    "gitlab": "GitLab",
    "vscode": "VS Code",
    "nodejs": "Node.js",
    "nextjs": "Next.js",
    "typescript": "TypeScript",
    "javascript": "JavaScript",
    "mongodb": "MongoDB",
    "postgresql": "PostgreSQL",
    "mysql": "MySQL",
    "aws": "AWS",
    "gcp": "Google Cloud",
    "ui": "UI",
    "api": "API",
    "ai": "AI",
    "ml": "ML",
    "ar": "AR",
    "vr": "VR",
    "iot": "IoT",
    "sdk": "SDK",
}

TAG_SYNONYMS: dict[str, list[str]] = {
    "github": ["git", "version control"],
    "docker": ["container", "virtualization"],
    "kubernetes": ["k8s", "orchestration"],
    "postgresql": ["postgres", "sql"],
    "mongodb": ["mongo", "nosql"],
    "javascript": ["js", "node"],
    "typescript": ["ts"],
    "react": ["reactjs"],
    "vue": ["vuejs"],
    "angular": ["ng"],
}

POPULAR_ICONS = [
    "github", "google", "microsoft", "apple", "amazon", "meta", "netflix",
    "openai", "claude", "anthropic", "gemini", "chatgpt",
    "aws", "azure", "googlecloud", "docker", "kubernetes",
    "react", "vue", "angular", "nodejs", "python", "javascript",
    "figma", "adobe", "vscode", "chrome", "firefox",
    "linkedin", "twitter", "instagram", "youtube", "tiktok",
    "mongodb", "postgresql", "redis", "elasticsearch",
]

# Recently popular picks, in display order.
TRENDING_ICONS = [
    "claude", "cursor", "perplexity", "midjourney", "runway",
    "vercel", "supabase", "planetscale", "railway", "render",
]

# Served when the icons directory is missing.
FALLBACK_ICONS = [
    "openai", "claude", "github", "figma", "google", "microsoft",
    "aws", "azure", "docker", "react", "nodejs", "python",
]


def _freeze_lists(table: Mapping[str, Iterable[str]], *, lower: bool = False) -> Mapping[str, tuple[str, ...]]:
    frozen = {
        key: tuple(value.lower() if lower else value for value in values)
        for key, values in table.items()
    }
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class IndexerConfig:
    """Read-only lookup tables driving categorization, naming and tagging.

    Mutable inputs are copied into tuples and mapping proxies, so a config can be
    shared between indexers and threads without anyone editing it underneath.
    """

    category_keywords: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: CATEGORY_KEYWORDS)
    special_names: Mapping[str, str] = field(default_factory=lambda: SPECIAL_DISPLAY_NAMES)
    tag_synonyms: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: TAG_SYNONYMS)
    popular: tuple[str, ...] = field(default_factory=lambda: tuple(POPULAR_ICONS))
    trending: tuple[str, ...] = field(default_factory=lambda: tuple(TRENDING_ICONS))
    fallback_icons: tuple[str, ...] = field(default_factory=lambda: tuple(FALLBACK_ICONS))
    variation_suffixes: tuple[tuple[str, Variation], ...] = VARIATION_SUFFIXES
    default_category: str = OTHER_CATEGORY

    def __post_init__(self) -> None:
        object.__setattr__(self, "category_keywords", _freeze_lists(self.category_keywords, lower=True))
        object.__setattr__(
            self,
            "special_names",
            MappingProxyType({key.lower(): value for key, value in self.special_names.items()}),
        )
        object.__setattr__(
            self,
            "tag_synonyms",
            _freeze_lists({key.lower(): values for key, values in self.tag_synonyms.items()}),
        )
        object.__setattr__(self, "popular", tuple(name.lower() for name in self.popular))
        object.__setattr__(self, "trending", tuple(name.lower() for name in self.trending))
        object.__setattr__(self, "fallback_icons", tuple(self.fallback_icons))
        object.__setattr__(self, "variation_suffixes", tuple(self.variation_suffixes))

    @property
    def categories(self) -> tuple[str, ...]:
        """Every category an icon can land in, in declaration order."""
        names = tuple(self.category_keywords)
        if self.default_category in names:
            return names
        return names + (self.default_category,)


DEFAULT_INDEXER_CONFIG = IndexerConfig()
