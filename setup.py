import re
from pathlib import Path
from typing import List

from setuptools import setup, find_packages

ROOT = Path(__file__).parent


def read_requirements(filename: str = "requirements.txt") -> List[str]:
    """Read install requirements, skipping comments and blank lines"""
    lines = (ROOT / filename).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


def get_version():
    file = ROOT / "zocal" / "__init__.py"
    return re.search(
        r'^__version__ *= *[\'"]([^\'"]*)[\'"]', file.read_text(encoding="utf-8"), re.M
    )[1]


setup(
    name="zocal",
    version=get_version(),
    description="Gregorian to Zoroastrian (Shenshai, Kadmi, Fasli) calendar engine",
    zip_safe=False,
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=read_requirements(),
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["zocal=zocal.__main__:main"]},
)
