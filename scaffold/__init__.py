"""
雲端測試專案產生器 (Scaffold)

依固定順序的模組目錄，替每個模組產生 Page Object、Playwright 測試、
Cucumber feature 與 step 定義，寫入標準目錄結構，
並以逐步遞增的假日期逐批 commit，模擬數週的開發歷史。

本產生器只輸出文字與 git 歷史，不會解析或執行產生的內容。

用法:
    python -m scaffold --output ./cloud_tests --init

產生：
    ./cloud_tests/
    ├── src/
    │   ├── pages/        DashboardPage.js, VirtualMachinePage.js, ...
    │   └── utils/        helpers.js
    ├── tests/            dashboard.test.js, ..., vm_update1.test.js
    │   └── steps/        dashboard.steps.js, ...
    ├── features/         dashboard.feature, ...
    └── data/             test-data.json
"""
