from typing import Final


DEFAULT_REPO_URL: Final[str] = (
    "https://github.com/vibeforge1111/vibeship-spawner-skills.git"
)
DEFAULT_MCP_ENDPOINT: Final[str] = "https://mcp.vibeship.co"
PROJECT_URL: Final[str] = "https://github.com/vibeforge1111/vibeship-spawner-skills"

SPAWNER_DIRNAME: Final[str] = ".spawner"
SKILLS_DIRNAME: Final[str] = "skills"
DIST_DIRNAME: Final[str] = "dist"
GIT_DIRNAME: Final[str] = ".git"

SKILL_YAML: Final[str] = "skill.yaml"
SHARP_EDGES_YAML: Final[str] = "sharp-edges.yaml"
COLLABORATION_YAML: Final[str] = "collaboration.yaml"
VALIDATIONS_YAML: Final[str] = "validations.yaml"
PATTERNS_MD: Final[str] = "patterns.md"
ANTI_PATTERNS_MD: Final[str] = "anti-patterns.md"
SHARP_EDGES_MD: Final[str] = "sharp-edges.md"
DECISIONS_MD: Final[str] = "decisions.md"

# Top-level directories of the skills repo that never hold categories.
NON_CATEGORY_DIRS: Final[tuple[str, ...]] = (
    "cli",
    "scripts",
    "dist",
    "node_modules",
    "mcp-server",
)

YAML_VALIDATION_IGNORED_DIRS: Final[tuple[str, ...]] = (
    "node_modules",
    ".git",
    "mcp-server",
    "dist",
    "build",
)

MCP_SERVERS_KEY: Final[str] = "mcpServers"
MCP_SERVER_NAME: Final[str] = "spawner"
MCP_SERVER_DESCRIPTION: Final[str] = (
    "Spawner V2 - Project memory, validation, skills, sharp edges"
)
CLAUDE_DESKTOP_CONFIG: Final[str] = "claude_desktop_config.json"
CLAUDE_CODE_CONFIG: Final[str] = ".mcp.json"

MCP_TOOLS: Final[tuple[tuple[str, str], ...]] = (
    ("spawner_orchestrate", "Auto-routing entry point"),
    ("spawner_validate", "Code validation and guardrails"),
    ("spawner_remember", "Persistent project memory"),
    ("spawner_watch_out", "Sharp edge detection"),
    ("spawner_unstick", "Escape hatch when stuck"),
    ("spawner_skills", "Skill search and retrieval"),
)

DESCRIPTION_PREVIEW_LIMIT: Final[int] = 50
SHARP_EDGES_LIMIT: Final[int] = 10
DELEGATION_TRIGGERS_LIMIT: Final[int] = 8
RECEIVES_FROM_LIMIT: Final[int] = 5
