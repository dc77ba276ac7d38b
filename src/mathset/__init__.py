# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Mathematical sets with deterministic ordered enumeration

mathset provides a generic Set container supporting union, intersection,
difference, subset/superset tests and a stable sorted enumeration driven
either by the natural order of the members or by a user-supplied comparator.
"""

from __future__ import annotations

__all__ = ["Comparator", "Set", "new", "new_with_comparator"]

__author__ = "FrankySnow9"
__contact__ = "clairicia.rcj.francis@gmail.com"
__copyright__ = "Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine"
__credits__ = ["FrankySnow9"]
__deprecated__ = False
__email__ = "clairicia.rcj.francis@gmail.com"
__license__ = "GNU GPL v3.0"
__maintainer__ = "FrankySnow9"
__status__ = "Development"
__version__ = "1.0.0.dev1"

from ._ordering import Comparator
from ._set import Set, new, new_with_comparator
from .version import version_info as version_info
