"""
Feature Writer
產生 Cucumber .feature 與對應的 step 定義。

這兩種產出物沒有任何模組專屬版本，Dashboard / VirtualMachine 也一樣用通用樣板。
"""

from scaffold.schema import Identifiers


class FeatureWriter:
    """產生 .feature 與 steps 內容"""

    def render_feature(self, ids: Identifiers) -> str:
        name = ids.type_form
        return f"""\
Feature: {name} Functionality
  As a cloud administrator
  I want to interact with the {name} module
  So that I can manage {ids.path_form} resources efficiently

  Scenario: Navigate to {name} page
    Given I am logged in as "admin"
    When I navigate to the {name} page
    Then I should see the {name} UI elements

  Scenario: Perform action on {name}
    Given I am logged in as "admin"
    When I perform action on {name} with value "test-value"
    Then I should see the {name} state as "Action completed"

  Scenario: Perform complex action on {name}
    Given I am logged in as "admin"
    When I perform complex action on {name} with value "complex-test" and option "option2"
    Then I should see the {name} state as "Complex action completed"
"""

    def render_steps(self, ids: Identifiers) -> str:
        name = ids.type_form
        page = ids.variable
        return f"""\
import {{ Given, When, Then }} from '@cucumber/cucumber';
import {{ {ids.class_name} }} from '../../src/pages/{ids.class_name}';
import {{ loginUser }} from '../../src/utils/helpers';

Given('I am logged in as {{string}}', async function (username) {{
  await loginUser(this.page, username, 'pass');
}});

When('I navigate to the {name} page', async function () {{
  const {page} = new {ids.class_name}(this.page);
  await {page}.goto{name}();
}});

When('I perform action on {name} with value {{string}}', async function (value) {{
  const {page} = new {ids.class_name}(this.page);
  await {page}.performAction({{ value }});
}});

When('I perform complex action on {name} with value {{string}} and option {{string}}', async function (value, option) {{
  const {page} = new {ids.class_name}(this.page);
  await {page}.performComplexAction({{ value, option }});
}});

Then('I should see the {name} state as {{string}}', async function (expectedState) {{
  const {page} = new {ids.class_name}(this.page);
  await {page}.verifyState(expectedState);
}});

Then('I should see the {name} UI elements', async function () {{
  const {page} = new {ids.class_name}(this.page);
  await {page}.verifyUIElements();
}});
"""
