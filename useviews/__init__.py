"""
use-views - Turn a React DOM or React Native project into a Views project.

A CLI tool that:
1. Fetches the latest versions of the Views dependencies from npm
2. Adds them to package.json and wires up the views-morph scripts
3. Installs the dependencies with yarn or npm
4. Writes a sample View and the files it needs to run

Usage:
    cd my-app
    use-views               # Convert the current project
    use-views --path my-app # Convert another directory
"""

__version__ = "0.1.0"
__author__ = "Views Tools"
