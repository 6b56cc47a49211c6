import pytest

from config import AppConfig
from document import SpecDocument
from utils import ConsoleLogger

SPEC_URL = "https://www.w3.org/TR/wai-aria-1.1/"


def ref(local_id: str) -> str:
    return f"{SPEC_URL}#{local_id}"


ROLE_INDEX = """
<section id="index_role"><dl>
  <dt><a href="#alert" class="role-reference"><code>alert</code></a></dt>
  <dd>A type of live region with important, and usually
      time-sensitive, information.</dd>
  <dt><a href="#presentation" class="role-reference"><code>presentation</code></a></dt>
  <dd>An element whose implicit native role semantics will not be mapped.</dd>
</dl></section>
"""

ATTRIBUTE_INDEX = """
<section id="index_state_prop"><dl>
  <dt><a href="#live" class="property-reference">live</a></dt>
  <dd>Indicates that an element will be updated.</dd>
  <dt><a href="#atomic" class="property-reference">atomic</a></dt>
  <dd>Indicates whether assistive technologies will present all of the region.</dd>
</dl></section>
"""

VALUE_TYPES = """
<section id="propcharacteristic_value"><dl>
  <dt id="valuetype_true-false">true/false</dt>
  <dd>Value representing either true or false.</dd>
  <dt id="valuetype_token">token</dt>
  <dd>One of a limited set of allowed values.</dd>
</dl></section>
"""

ROLE_ALERT = """
<section class="role" id="alert">
  <h4 class="role-name" title="alert"><code>alert</code></h4>
  <table class="role-features"><tbody>
    <tr><th>Superclass Role:</th><td class="role-parent"></td></tr>
    <tr><th>Supported States and Properties:</th><td class="role-properties"><ul>
      <li><a href="#live" class="property-reference">live</a></li>
      <li><a href="#atomic" class="property-reference">atomic</a></li>
    </ul></td></tr>
  </tbody></table>
</section>
"""

ROLE_PRESENTATION = """
<section class="role" id="presentation">
  <h4 class="role-name"><code>presentation</code></h4>
</section>
"""

ROLE_NONE = """
<section class="role" id="none">
  <h4 class="role-name"><code>none</code></h4>
  <table class="role-features"><tbody>
    <tr><th>Is Abstract:</th><td class="role-abstract">False</td></tr>
  </tbody></table>
</section>
"""

ROLE_NONE_WITH_PRESENTATION = """
<section class="role" id="none">
  <h4 class="role-name"><code>none</code></h4>
  <table class="role-features"><tbody>
    <tr><th>Superclass Role:</th><td class="role-parent">
      <a href="#presentation" class="role-reference">presentation</a>
    </td></tr>
  </tbody></table>
</section>
"""

ATTR_LIVE = """
<section class="property" id="live">
  <h4 class="property-name"><code>live</code></h4>
  <table class="property-features"><tbody>
    <tr><th>Value:</th><td class="property-value"><a href="#valuetype_token">token</a></td></tr>
  </tbody></table>
  <table class="value-descriptions">
    <thead><tr><th>Value</th><th>Description</th></tr></thead>
    <tbody>
      <tr><th class="value-name">assertive</th><td class="value-description">Highest priority.</td></tr>
      <tr><th class="value-name">off (default)</th><td class="value-description">Updates are not presented.</td></tr>
      <tr><th class="value-name">polite</th><td class="value-description">Lower priority.</td></tr>
    </tbody>
  </table>
</section>
"""

ATTR_ATOMIC = """
<section class="property" id="atomic">
  <h4 class="property-name"><code>atomic</code></h4>
  <table class="property-features"><tbody>
    <tr><th>Value:</th><td class="property-value"><a href="#valuetype_true-false">true/false</a></td></tr>
  </tbody></table>
  <table class="value-descriptions">
    <thead><tr><th>Value</th><th>Description</th></tr></thead>
    <tbody>
      <tr><th class="value-name">false (default)</th><td class="value-description">Only changed nodes.</td></tr>
      <tr><th class="value-name">true</th><td class="value-description">The whole region.</td></tr>
    </tbody>
  </table>
</section>
"""


def page(*sections: str) -> str:
    return "<html><head><title>WAI-ARIA 1.1</title></head><body>\n" + "\n".join(sections) + "\n</body></html>"


ALERT_PAGE = page(ROLE_INDEX, ATTRIBUTE_INDEX, VALUE_TYPES, ROLE_ALERT, ATTR_LIVE, ATTR_ATOMIC)


@pytest.fixture
def spec_url():
    return SPEC_URL


@pytest.fixture
def make_document():
    def _make(*sections: str, url: str = SPEC_URL) -> SpecDocument:
        return SpecDocument.from_html(page(*sections), url)
    return _make


@pytest.fixture
def alert_document():
    return SpecDocument.from_html(ALERT_PAGE, SPEC_URL)


@pytest.fixture
def alert_html(tmp_path):
    path = tmp_path / "wai-aria-1.1.html"
    path.write_text(ALERT_PAGE, encoding="utf-8")
    return str(path)


@pytest.fixture
def quiet_logger():
    return ConsoleLogger(debug=False)


@pytest.fixture
def app_config(tmp_path, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    cfg = AppConfig()
    cfg.output.output_path = str(tmp_path / "data.json")
    return cfg
