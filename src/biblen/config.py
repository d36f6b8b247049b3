"""biblen 配置

配置分为以下几类：
- 显示配置：最小窗口尺寸、布局偏移、颜色
- 输入配置：轮询超时、按键绑定
- Git 配置：上游分支、子进程超时
- 日志配置
"""

# === 显示配置 ===
MIN_WIDTH = 80  # 最小列数
MIN_HEIGHT = 24  # 最小行数
ART_TOP_ROW = 2  # ASCII art 起始行
HIGHLIGHT_COLOR = "green"  # footer / status 前景色

# 每行等宽（28 列），尾部空格保证整体对齐
ASCII_ART = "\n".join([
    r"| |   (_) |        | |      ",
    r"| |__  _| |__   ___| |_ __  ",
    r"| '_ \| | '_ \ / _ \ | '_ \ ",
    r"| |_) | | |_) |  __/ | | | |",
    r"|_.__/|_|_.__/ \___|_|_| |_|",
])

FOOTER = "[q]uit - [c]heck"

# === 输入配置 ===
POLL_TIMEOUT = 0.1  # 等待输入事件的超时（秒）
QUIT_KEY = "q"
CHECK_KEY = "c"

# === Git 配置 ===
GIT_EXECUTABLE = "git"
UPSTREAM_REF = "origin/main"  # ahead/behind 对比的远端主线
GIT_TIMEOUT_SECONDS = 30.0  # 单次 git 调用上限

# === 日志配置 ===
LOG_LEVEL = "INFO"  # biblen logger 级别

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集
