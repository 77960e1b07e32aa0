"""Catalog sections, run in registration order."""

from typing import Dict, Type

from devcleanup.core.section import Section

# This will be populated by each section module, in import order
SECTION_REGISTRY: Dict[str, Type[Section]] = {}

# Import all section modules to ensure they register themselves
from . import gradle
from . import flutter
from . import node
from . import cocoapods
from . import swiftpm
from . import python_ruby
from . import homebrew
from . import vscode
from . import xcode
from . import docker
