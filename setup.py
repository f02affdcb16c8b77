from pathlib import Path

from setuptools import find_packages, setup

try:
    from genelib.utils.config_reference import write_markdown as write_config_markdown
except Exception as exc:  # pragma: no cover - setup-time safety
    print(f"Warning: unable to import config reference generator: {exc}")
    write_config_markdown = None

if write_config_markdown:
    try:
        write_config_markdown(Path("docs") / "config_reference.md")
    except Exception as exc:  # pragma: no cover - setup-time safety
        print(f"Warning: unable to generate config reference: {exc}")


setup(
    name="GeneLib",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"genelib": ["configs/*.yaml"]},
    py_modules=["cli"],
    python_requires=">=3.9",
    install_requires=Path("requirements.txt").read_text(encoding="utf-8").splitlines(),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["genelib=cli:main"]},
)
