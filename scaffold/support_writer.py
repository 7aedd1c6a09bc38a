"""
Support Writer
產生與模組無關的共用檔案：helpers 工具函式與雲端資源測試資料 JSON。
"""

import json

# 測試資料：VM / 儲存 / 使用者三組集合
FIXTURE_DATA = {
    "vms": [
        {"id": "vm001", "name": "prod-vm-1", "status": "running", "region": "us-east"},
        {"id": "vm002", "name": "test-vm-2", "status": "stopped", "region": "us-west"},
    ],
    "storage": [
        {"id": "st001", "name": "data-store-1", "size": "500GB", "type": "block"},
        {"id": "st002", "name": "backup-store-2", "size": "1TB", "type": "object"},
    ],
    "users": [
        {"username": "admin", "role": "admin", "accessLevel": "full"},
        {"username": "user1", "role": "user", "accessLevel": "read"},
    ],
}

_HELPERS = """\
import { expect } from '@playwright/test';

/**
 * Utility functions for cloud test automation suite.
 */
export async function loginUser(page, username, password) {
  await page.goto('/login');
  await page.fill('#username', username);
  await page.fill('#password', password);
  await page.click('#login-button');
  await page.waitForURL('/dashboard');
}

export async function setupTestData(page, data) {
  await page.evaluate((testData) => {
    window.localStorage.setItem('cloudTestData', JSON.stringify(testData));
  }, data);
}

export async function clearTestData(page) {
  await page.evaluate(() => {
    window.localStorage.clear();
  });
}

export async function generateCloudReport(page, reportName) {
  await page.evaluate((name) => {
    console.log(`Generating cloud report: ${name}`);
  }, reportName);
}

export async function scaleVM(page, scaleFactor) {
  await page.fill('#virtualmachine-scale-factor', scaleFactor.toString());
  await page.click('#virtualmachine-scale');
  await expect(page.locator('#virtualmachine-status')).toHaveText('Scaling in progress');
}
"""


class SupportWriter:
    """產生共用 helpers 與測試資料"""

    def render_helpers(self) -> str:
        return _HELPERS

    def render_fixture_data(self) -> str:
        return json.dumps(FIXTURE_DATA, indent=2, ensure_ascii=False) + "\n"
