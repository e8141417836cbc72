from setuptools import find_namespace_packages, setup

package_name = "mazepath"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.0.3",
    packages=find_namespace_packages(
        include=[package_name, package_name + ".*"]
    ),  # Exclude tests, examples and subpackages outside mazepath
    install_requires=read_requirements(),
    python_requires=">=3.10",
    zip_safe=True,
    description="Shortest-cost routes on grid mazes with directional walls and one-way jumps",
    license="MIT",
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["mazepath = mazepath.main:app"],
    },
)
