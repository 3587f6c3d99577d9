import logging
from typing import Optional

from mcp.types import TextContent
from pydantic import BaseModel, Field, ValidationError, field_validator

from folderscope.ai.manager import build_rotator, get_provider_class, resolve_model
from folderscope.collector import read_local_folder
from folderscope.config import ANALYZER_PROVIDER, api_key_env_names, load_api_keys
from folderscope.prompts import ANALYSIS_MODES, DEFAULT_MODE, build_prompt

logger = logging.getLogger(__name__)

TOOL_NAME = "analyze_local_folder"


class ToolError(Exception):
    """Tool call failed; the message is the Markdown shown to the client."""


class AnalyzeFolderArgs(BaseModel):
    folderPath: str = Field(
        min_length=1,
        description=(
            "Path to the project folder, e.g. '/home/user/myproject', "
            "'C:\\\\Users\\\\Name\\\\MyProject', '.' or './src'. Every readable "
            "text file inside it is sent along with the question."
        ),
    )
    question: str = Field(
        min_length=1,
        max_length=2000,
        description=(
            "Anything about the codebase, e.g. 'How does authentication work?', "
            "'Find all API endpoints', 'Review code quality'."
        ),
    )
    analysisMode: Optional[str] = Field(
        default=None,
        description=(
            "Expert persona for the answer. 'general' (default), 'implementation', "
            "'debugging', 'security', 'architecture', 'audit' and 'performance' have "
            "dedicated prompts; the other modes use the general one."
        ),
        json_schema_extra={"enum": list(ANALYSIS_MODES)},
    )

    @field_validator("analysisMode")
    @classmethod
    def check_mode(cls, value):
        if value is not None and value not in ANALYSIS_MODES:
            raise ValueError(f"unknown analysis mode '{value}'")
        return value


def tool_input_schema():
    return AnalyzeFolderArgs.model_json_schema()


def format_validation_error(exc):
    lines = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        lines.append(f"- `{field}`: {error['msg']}")
    return "# Local Folder Analysis - Invalid Arguments\n\n" + "\n".join(lines)


def format_missing_key(provider_name):
    env_names = api_key_env_names(provider_name)
    return (
        "# Local Folder Analysis - API Key Required\n\n"
        f"**No {provider_name} API key found**\n\n"
        "Set one key, or several separated by commas to rotate between them:\n"
        "```bash\n"
        f'export {env_names[1]}="key-one,key-two"\n'
        "```\n\n"
        f"Accepted variables: {', '.join(f'`{name}`' for name in env_names)}"
    )


def format_no_files(folder_path):
    return (
        "# Local Folder Analysis - No Files Found\n\n"
        f"**No readable files found in:** `{folder_path}`\n\n"
        "- Check the folder exists and is readable\n"
        "- Make sure it contains text source files\n\n"
        "Ignored: node_modules, .git, dist, build, binary files, logs and temp files"
    )


def format_failure(folder_path, message):
    return (
        "# Local Folder Analysis - Error\n\n"
        f"**Error analyzing folder:** {message}\n\n"
        f"- Check the folder path is accessible: `{folder_path}`\n"
        "- Check the API key(s) are valid and have quota remaining\n"
        "- Try a smaller folder first"
    )


def format_result(params, folder, result):
    mode = params.analysisMode or DEFAULT_MODE
    return (
        "# Local Folder Analysis Results\n\n"
        f"## Project: {folder.project_name}\n\n"
        f"**Folder Path:** `{params.folderPath}`  \n"
        f"**Question:** {params.question}  \n"
        f"**Analysis Mode:** {mode}  \n"
        f"**Files Processed:** {folder.file_count}  \n"
        f"**Content Size:** {len(folder.context):,} characters\n\n"
        "---\n\n"
        "## Analysis\n\n"
        f"{result.content}\n\n"
        "---\n\n"
        f"*Analysis by {result.provider} in {mode} mode*"
    )


async def handle_analyze_local_folder(
    arguments,
    rotator=None,
    provider_name=None,
    provider_class=None,
):
    try:
        params = AnalyzeFolderArgs.model_validate(arguments or {})
    except ValidationError as exc:
        raise ToolError(format_validation_error(exc)) from exc

    provider_name = provider_name or ANALYZER_PROVIDER
    api_keys = load_api_keys(provider_name)
    if not api_keys:
        logger.warning("❌ No API keys configured for %s", provider_name)
        raise ToolError(format_missing_key(provider_name))

    try:
        folder = await read_local_folder(params.folderPath)
        if folder.file_count == 0:
            raise ToolError(format_no_files(params.folderPath))

        provider_class = provider_class or get_provider_class(provider_name)
        model = resolve_model(provider_name)
        prompt = build_prompt(
            params.analysisMode, folder.project_name, params.question, folder.context
        )
        rotator = rotator or build_rotator()

        logger.info(
            "📩 Analyzing %s (%d files) with %s/%s across %d key(s)",
            folder.project_name,
            folder.file_count,
            provider_name,
            model,
            len(api_keys),
        )
        result = await rotator.execute(
            api_keys,
            provider_class,
            lambda client: client.generate(prompt, model),
        )
    except ToolError:
        raise
    except Exception as exc:
        logger.error("❌ Folder analysis failed: %s", exc)
        raise ToolError(format_failure(params.folderPath, exc)) from exc

    logger.info("📤 Analysis of %s complete", folder.project_name)
    return [TextContent(type="text", text=format_result(params, folder, result))]
