import os

SKILLS_FOLDER_ENV_VAR = "SKILLS_REF_SKILLS_FOLDER"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


def get_skills_folder() -> str | None:
    """Get the default skills folder from the SKILLS_REF_SKILLS_FOLDER environment variable.

    Returns:
        The configured folder, or None when the variable is unset or blank.
    """
    skills_folder = os.getenv(SKILLS_FOLDER_ENV_VAR, "").strip()
    return skills_folder or None


def get_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
