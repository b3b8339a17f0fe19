from setuptools import setup, find_packages

setup(
    name="gitcmd",
    version="0.1.0",
    description="Validated git command-line construction over the git binary",
    python_requires=">=3.9",
    packages=find_packages(include=["gitcmd", "gitcmd.*"]),
    install_requires=["pyyaml>=6.0.0"],
    extras_require={
        "dev": ["pytest>=7.4.0"],
    },
    keywords=["git", "vcs", "subprocess", "wrapper"],
    license="Apache-2.0",
)
