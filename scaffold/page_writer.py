"""
Page Object Writer
根據模組名稱產生 Playwright Page Object 內容。

Dashboard 與 VirtualMachine 有專屬樣板，其餘模組一律使用通用樣板
（goto / performAction / verifyUIElements / performComplexAction / verifyState）。
"""

from scaffold.schema import Identifiers, derive_identifiers


def _dashboard_page(ids: Identifiers) -> str:
    vm = derive_identifiers("VirtualMachine")
    storage = derive_identifiers("Storage")
    return f"""\
import {{ expect }} from '@playwright/test';
import {{ loginUser }} from '../utils/helpers';

/**
 * Page object for the cloud dashboard, handling metrics, alerts, and navigation.
 */
export class {ids.class_name} {{
  constructor(page) {{
    this.page = page;
    this.locators = {{
      overview: '{ids.selector('overview')}',
      metrics: '{ids.selector('metrics')}',
      alerts: '{ids.selector('alerts')}',
      navToVM: '#nav-{vm.path_form}',
      navToStorage: '#nav-{storage.path_form}',
    }};
  }}

  async goto{ids.type_form}() {{
    await loginUser(this.page, 'admin', 'pass');
    await this.page.goto('{ids.route}');
    await expect(this.page).toHaveURL(/{ids.path_form}/);
  }}

  async verifyMetrics() {{
    await expect(this.page.locator(this.locators.metrics)).toBeVisible();
    await expect(this.page.locator(this.locators.metrics)).toContainText('CPU Usage');
    await expect(this.page.locator(this.locators.metrics)).toContainText('Memory Usage');
  }}

  async checkAlerts(expectedCount = 0) {{
    const alerts = this.page.locator(this.locators.alerts);
    await expect(alerts).toHaveCount(expectedCount);
  }}

  async navigateTo{vm.type_form}() {{
    await this.page.click(this.locators.navToVM);
    await expect(this.page).toHaveURL(/{vm.path_form}/);
  }}

  async navigateTo{storage.type_form}() {{
    await this.page.click(this.locators.navToStorage);
    await expect(this.page).toHaveURL(/{storage.path_form}/);
  }}

  async verifyOverview() {{
    await expect(this.page.locator(this.locators.overview)).toContainText('Cloud Overview');
  }}
}}
"""


def _virtual_machine_page(ids: Identifiers) -> str:
    return f"""\
import {{ expect }} from '@playwright/test';
import {{ setupTestData }} from '../utils/helpers';

/**
 * Page object for managing virtual machines in the cloud platform.
 */
export class {ids.class_name} {{
  constructor(page) {{
    this.page = page;
    this.locators = {{
      vmList: '{ids.selector('list')}',
      createButton: '{ids.selector('create')}',
      vmNameInput: '{ids.selector('name')}',
      vmTypeSelect: '{ids.selector('type')}',
      submitButton: '{ids.selector('submit')}',
      status: '{ids.selector('status')}',
      deleteButton: '{ids.selector('delete')}',
      confirmDelete: '{ids.selector('confirm-delete')}',
    }};
  }}

  async goto{ids.type_form}() {{
    await setupTestData(this.page, {{ module: '{ids.path_form}' }});
    await this.page.goto('{ids.route}');
    await expect(this.page).toHaveURL(/{ids.path_form}/);
  }}

  async createVM(config = {{ name: 'test-vm', type: 'standard' }}) {{
    await this.page.click(this.locators.createButton);
    await this.page.fill(this.locators.vmNameInput, config.name);
    await this.page.selectOption(this.locators.vmTypeSelect, config.type);
    await this.page.click(this.locators.submitButton);
    await expect(this.page.locator(this.locators.status)).toHaveText('VM created successfully');
  }}

  async verifyVMList(expectedCount) {{
    const vms = this.page.locator(this.locators.vmList);
    await expect(vms).toHaveCount(expectedCount);
  }}

  async deleteVM(vmName) {{
    await this.page.click(`text=${{vmName}}`);
    await this.page.click(this.locators.deleteButton);
    await this.page.click(this.locators.confirmDelete);
    await expect(this.page.locator(this.locators.status)).toHaveText('VM deleted');
  }}

  async verifyVMStatus(vmName, expectedStatus) {{
    await this.page.click(`text=${{vmName}}`);
    await expect(this.page.locator(this.locators.status)).toHaveText(expectedStatus);
  }}
}}
"""


def _generic_page(ids: Identifiers) -> str:
    return f"""\
import {{ expect }} from '@playwright/test';
import {{ setupTestData }} from '../utils/helpers';

/**
 * Page object for the {ids.type_form} module in the cloud platform.
 */
export class {ids.class_name} {{
  constructor(page) {{
    this.page = page;
    this.locators = {{
      mainInput: '{ids.selector('input')}',
      actionButton: '{ids.selector('action')}',
      status: '{ids.selector('status')}',
      header: '{ids.selector('header')}',
      optionSelect: '{ids.selector('select')}',
    }};
  }}

  async goto{ids.type_form}() {{
    await setupTestData(this.page, {{ module: '{ids.path_form}' }});
    await this.page.goto('{ids.route}');
    await expect(this.page).toHaveURL(/{ids.path_form}/);
  }}

  async performAction(data = {{}}) {{
    await this.page.fill(this.locators.mainInput, data.value ?? 'test-{ids.path_form}');
    await this.page.click(this.locators.actionButton);
    await expect(this.page.locator(this.locators.status)).toHaveText('Action completed');
  }}

  async verifyUIElements() {{
    await expect(this.page.locator(this.locators.header)).toBeVisible();
    await expect(this.page.locator(this.locators.mainInput)).toBeEnabled();
  }}

  async performComplexAction(data = {{}}) {{
    await this.performAction(data);
    await this.page.selectOption(this.locators.optionSelect, data.option || 'option1');
    await expect(this.page.locator(this.locators.status)).toHaveText('Complex action completed');
  }}

  async verifyState(expectedState) {{
    await expect(this.page.locator(this.locators.status)).toHaveText(expectedState);
  }}
}}
"""


# 模組名稱 → 專屬樣板
_SPECIALIZED = {
    "Dashboard": _dashboard_page,
    "VirtualMachine": _virtual_machine_page,
}


class PageWriter:
    """產生 Page Object 內容"""

    def render(self, ids: Identifiers) -> str:
        template = _SPECIALIZED.get(ids.type_form, _generic_page)
        return template(ids)
