from setuptools import setup, find_packages

setup(
    name="lifetrack",
    version="0.1.0",
    packages=find_packages(include=["lifetrack", "lifetrack.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "alembic",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings",
        "pytest",
        "httpx",
    ],
)
