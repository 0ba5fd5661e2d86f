from setuptools import setup, find_packages

setup(
    name="adsbot-kit",
    version="0.1.0",
    packages=find_packages(),
    install_requires=[
        "httpx",
        "pydantic>=2",
        "discord.py>=2.0",
        "python-dotenv",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-asyncio",
        ]
    },
    entry_points={
        "console_scripts": [
            "adsbot=adsbot_kit.run_ads_bot:main",
        ],
    },
    author="Adsbot Team",
    author_email="",
    description="Discord slash commands for Meta ad sets",
    long_description="Discord bot that searches, summarizes and bulk-pauses or activates ad sets of one Meta ad account, with demo data when the Marketing API is not configured",
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
