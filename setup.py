# -*- mode: python; encoding: utf-8 -*-
#
# Copyright 2021 the Pygmentizer contributors
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License.  You may obtain a copy of
# the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.  See the
# License for the specific language governing permissions and limitations under
# the License.

from setuptools import setup, find_packages

try:
    with open("README.rst", "r", encoding="utf-8") as file:
        README_rst = file.read().splitlines()
except OSError:
    README_rst = [""]

with open("requirements.txt", "r", encoding="utf-8") as file:
    requirements = [
        line for line in file.read().splitlines() if line and not line.startswith("#")
    ]

setup(
    name="pygmentizer",
    version="1.0.0",
    description=README_rst[0],
    long_description="\n".join(README_rst[2:]),
    author="The Pygmentizer contributors",
    license="Apache License, Version 2.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Markup",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
    ],
    packages=find_packages("src", include=["pygmentizer", "pygmentizer.*"]),
    package_dir={"": "src"},
    entry_points={
        "console_scripts": [
            "pygmentizectl = pygmentizer.pygmentizectl:main",
        ]
    },
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    zip_safe=True,
)
