from __future__ import annotations

from pathlib import Path

import pytest

RULES = '''
[[rule]]
id = "naming.bloc-suffix"
title = "BLoC classes end with Bloc"
description = "Name every BLoC after its feature."

[rule.names]
bloc = { do = ["AuthBloc"], dont = ["AuthManager"] }

[[rule]]
id = "size.widget-length"
title = "Keep widgets short"
description = "Split widgets that grow too long."
limit = 200
unit = "lines"

[[rule]]
id = "release.hotfix-flow"
title = "Hotfixes branch from the release tag"
description = "Cut hotfix branches from the tag that shipped."
'''

DOCUMENT = '''
id = "guide"
title = "Team Guide"

[[section]]
id = "naming"
title = "Naming"
rules = ["naming.bloc-suffix", "size.widget-length"]

[[section.tree]]
title = "App layout"
outline = \'\'\'
lib/
  features/
  main.dart
\'\'\'

[[section]]
id = "release"
title = "Release"
rules = ["release.hotfix-flow"]

[[section.runbook]]
title = "Clean rebuild"
commands = ["flutter clean", "flutter pub get"]

[[section.runbook]]
title = "Reinstall iOS pods"
commands = ["cd ios", "pod install"]
'''


@pytest.fixture
def guide_dir(tmp_path: Path) -> Path:
    """A small guide source: rules.toml plus one document."""
    root = tmp_path / "guide"
    (root / "documents").mkdir(parents=True)
    (root / "rules.toml").write_text(RULES, encoding="utf-8")
    (root / "documents" / "guide.toml").write_text(DOCUMENT, encoding="utf-8")
    return root
