"""
Setup configuration for Theory Drill package.

This allows you to install the project with:
    pip install -e .

After installation, you can import modules like:
    from theory_drill.rules.quizzes import chord_function_quiz
    from theory_drill.data.schema import Quiz
"""

from setuptools import setup, find_packages

# Read the README for long description
with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    # -------------------------
    # Basic Package Information
    # -------------------------
    name="theory-drill",
    version="0.1.0",
    description="Terminal drills for note reading, major scales, Italian note names and diatonic chords",
    long_description=long_description,
    long_description_content_type="text/markdown",

    # -------------------------
    # Package Discovery
    # -------------------------
    packages=find_packages(where=".", include=["theory_drill", "theory_drill.*"]),
    package_dir={"": "."},

    # -------------------------
    # Python Version Requirement
    # -------------------------
    python_requires=">=3.9",

    # -------------------------
    # Dependencies
    # -------------------------
    install_requires=[
        "pydantic>=2.0.0",
    ],

    # Optional dependencies (install with pip install -e ".[dev]")
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "flake8>=6.1.0",
            "black>=23.7.0",
            "mypy>=1.5.0",
        ],
    },

    # -------------------------
    # Entry Points (CLI commands)
    # -------------------------
    entry_points={
        "console_scripts": [
            # This creates a command-line tool: theory-drill --game 4
            "theory-drill=theory_drill.app.cli:main",
        ],
    },

    # -------------------------
    # Metadata
    # -------------------------
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Topic :: Multimedia :: Sound/Audio",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    keywords="music theory, ear training, scales, chords, quiz, terminal",
)
