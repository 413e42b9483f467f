import os


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SITE_NAME = os.getenv("SITE_NAME", "Next.js Mastery")
    SITE_TAGLINE = (
        "Complete guide to mastering Next.js - Every method, every concept, "
        "nothing left out"
    )

    # Pygments style served at /code.css
    CODEBLOCK_STYLE = os.getenv("CODEBLOCK_STYLE", "monokai")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
