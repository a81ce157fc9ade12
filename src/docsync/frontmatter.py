import re
from dataclasses import dataclass

from docsync.config import config

HEADING_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
WORD_SPLIT_RE = re.compile(r"[-_]")


def get_doc_name(package_name: str) -> str:
    """Convert a kebab-case or snake_case directory name to a Title Case name."""
    return " ".join(word[:1].upper() + word[1:] for word in WORD_SPLIT_RE.split(package_name))


def extract_title(content: str, fallback: str) -> str:
    """Return the first top-level heading of ``content``, or a title derived from ``fallback``."""
    match = HEADING_RE.search(content)
    if match:
        title = match.group(1).rstrip()
        if title:
            return title
    return get_doc_name(fallback)


def escape_quotes(value: str) -> str:
    return value.replace('"', '\\"')


@dataclass(frozen=True)
class Frontmatter:
    sidebar_position: int
    title: str
    description: str

    def render(self) -> str:
        return (
            "---\n"
            f"sidebar_position: {self.sidebar_position}\n"
            f'title: "{escape_quotes(self.title)}"\n'
            f'description: "{self.description}"\n'
            "---\n\n"
        )


def build_frontmatter(content: str, package_name: str, package_type: str) -> Frontmatter:
    return Frontmatter(
        sidebar_position=config["sidebar_position"],
        title=extract_title(content, package_name),
        description=f"Documentation for {package_name} {package_type} package",
    )


def compose_document(content: str, package_name: str, package_type: str) -> str:
    """Prepend the Docusaurus frontmatter to an unmodified README body."""
    return build_frontmatter(content, package_name, package_type).render() + content
