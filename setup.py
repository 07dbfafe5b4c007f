from setuptools import setup, find_packages

setup(
    name="dropbox-paper-export",
    version="0.1.0",
    description="Export Dropbox Paper docs to Markdown, mirroring the folder tree",
    packages=find_packages(include=["paper_export", "paper_export.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=["tqdm"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "paper-export=paper_export.__main__:main",
        ]
    },
)
