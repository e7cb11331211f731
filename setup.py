#!/usr/bin/env python3
# ========================================================================== #
#                                                                            #
#    KEYCODEGEN - The keyboard key code generator.                           #
#                                                                            #
#    Copyright (C) 2026  The keycodegen authors                              #
#                                                                            #
#    This program is free software: you can redistribute it and/or modify    #
#    it under the terms of the GNU General Public License as published by    #
#    the Free Software Foundation, either version 3 of the License, or       #
#    (at your option) any later version.                                     #
#                                                                            #
#    This program is distributed in the hope that it will be useful,         #
#    but WITHOUT ANY WARRANTY; without even the implied warranty of          #
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the           #
#    GNU General Public License for more details.                            #
#                                                                            #
#    You should have received a copy of the GNU General Public License       #
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.  #
#                                                                            #
# ========================================================================== #


from setuptools import setup


# =====
def main() -> None:
    setup(
        name="keycodegen",
        version="1.0",
        license="GPLv3",
        description="Generator of the keyboard keys and platform maps sources",
        platforms="any",

        packages=[
            "keycodegen",
            "keycodegen.validators",
            "keycodegen.yamlconf",
            "keycodegen.apps",
            "keycodegen.apps.gen",
        ],

        python_requires=">=3.10",
        install_requires=[
            "PyYAML",
            "Pygments",
        ],
        extras_require={
            "tests": [
                "pytest",
                "pytest-mock",
            ],
        },

        entry_points={
            "console_scripts": [
                "keycodegen = keycodegen.apps.gen:main",
            ],
        },

        classifiers=[
            "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
            "Development Status :: 5 - Production/Stable",
            "Programming Language :: Python :: 3",
            "Topic :: Software Development :: Code Generators",
            "Operating System :: OS Independent",
            "Intended Audience :: Developers",
        ],
    )


if __name__ == "__main__":
    main()
