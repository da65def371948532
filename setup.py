from setuptools import setup, find_packages

setup(
    name="mistral-client",
    version="0.2.0",
    description="Python client for the Mistral AI API with a streaming chatbot",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    include_package_data=True,
    install_requires=[
        "requests",
        "pydantic>=2",
        "python-dotenv",
        "rich",
        "prompt_toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mistral-chat=mistral_client.main:main",
        ],
    },
    python_requires=">=3.8",
)
