"""
Test Writer
根據模組名稱產生 Playwright 測試內容。
Dashboard / VirtualMachine 有專屬測試，其餘模組使用通用測試；
另外負責 VM 維護測試 (vm_update<n>)。
"""

from scaffold.schema import Identifiers, derive_identifiers


def _header(ids: Identifiers) -> str:
    return f"""\
import {{ test, expect }} from '@playwright/test';
import {{ {ids.class_name} }} from '../src/pages/{ids.class_name}';
import {{ loginUser }} from '../src/utils/helpers';

test.describe('{ids.type_form} Tests', () => {{
  test.beforeEach(async ({{ page }}) => {{
    await loginUser(page, 'admin', 'pass');
  }});
"""


def _dashboard_test(ids: Identifiers) -> str:
    vm = derive_identifiers("VirtualMachine")
    page = ids.variable
    return _header(ids) + f"""
  test('should display metrics on dashboard', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.verifyMetrics();
  }});

  test('should have no alerts on dashboard', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.checkAlerts(0);
  }});

  test('should navigate to Virtual Machine page', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.navigateTo{vm.type_form}();
  }});

  test('should verify dashboard overview', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.verifyOverview();
  }});
}});
"""


def _virtual_machine_test(ids: Identifiers) -> str:
    page = ids.variable
    return _header(ids) + f"""
  test('should create a virtual machine', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.createVM({{ name: 'test-vm', type: 'standard' }});
  }});

  test('should list seeded virtual machines', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.verifyVMList(2);
  }});

  test('should show virtual machine status', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.verifyVMStatus('prod-vm-1', 'running');
  }});

  test('should delete a virtual machine after confirmation', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.createVM({{ name: 'temp-vm', type: 'standard' }});
    await {page}.deleteVM('temp-vm');
  }});
}});
"""


def _generic_test(ids: Identifiers) -> str:
    page = ids.variable
    return _header(ids) + f"""
  test('should navigate to {ids.type_form} page', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.verifyUIElements();
  }});

  test('should perform action on {ids.type_form}', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.performAction({{ value: 'test-value' }});
    await {page}.verifyState('Action completed');
  }});

  test('should perform complex action on {ids.type_form}', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.performComplexAction({{ value: 'complex-test', option: 'option2' }});
    await {page}.verifyState('Complex action completed');
  }});

  test('should handle {ids.type_form} error case', async ({{ page }}) => {{
    const {page} = new {ids.class_name}(page);
    await {page}.goto{ids.type_form}();
    await {page}.performAction({{ value: '' }});
    await expect(page.locator('#error')).toHaveText('Invalid input');
  }});
}});
"""


_SPECIALIZED = {
    "Dashboard": _dashboard_test,
    "VirtualMachine": _virtual_machine_test,
}


class TestWriter:
    """產生測試檔內容"""

    # 避免 pytest 把這個類別當成測試收集
    __test__ = False

    def render(self, ids: Identifiers) -> str:
        template = _SPECIALIZED.get(ids.type_form, _generic_test)
        return template(ids)

    def render_maintenance(self, sequence: int) -> str:
        """VM 維護測試，sequence 從 1 開始"""
        vm = derive_identifiers("VirtualMachine")
        return f"""\
import {{ test }} from '@playwright/test';
import {{ {vm.class_name} }} from '../src/pages/{vm.class_name}';

test('VM maintenance update {sequence}', async ({{ page }}) => {{
  const vmPage = new {vm.class_name}(page);
  await vmPage.goto{vm.type_form}();
  await vmPage.createVM({{ name: 'update-vm-{sequence}', type: 'high-performance' }});
  await vmPage.verifyVMList(3);
}});
"""
