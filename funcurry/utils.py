# Copyright 2017 Daniel Hilst Selli
# 
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
# 
#     http://www.apache.org/licenses/LICENSE-2.0
# 
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License. 
# 

import logging
import os

LOG_LEVEL_ENV = "FUNCURRY_LOG_LEVEL"


def log_level(default=logging.WARNING):
    "Level named by FUNCURRY_LOG_LEVEL, or default"
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


logger = logging.getLogger("funcurry")
logger.setLevel(log_level())
console_handler = logging.StreamHandler()
formatter = logging.Formatter("==> %(levelname)s: %(message)s")
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)


def display_name(func, default="__ANON__"):
    "Name used for func in diagnostics"
    name = getattr(func, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        return default
    return name
