# -*- coding: utf-8 -*-
# Well-known sources
OS_RELEASE_PATHS = ("/etc/os-release", "/usr/lib/os-release")
SYSTEM_VERSION_PLIST = "/System/Library/CoreServices/SystemVersion.plist"

# os-release keys
OS_RELEASE_ID = "ID"
OS_RELEASE_VERSION_ID = "VERSION_ID"
OS_RELEASE_VERSION_CODENAME = "VERSION_CODENAME"

# SystemVersion.plist keys
PLIST_PRODUCT_VERSION = "ProductVersion"

# Display prefixes
MACOS_NAME = "macOS"
OPENBSD_NAME = "openbsd"
WINDOWS_NAME = "windows"

# Win32
NTDLL = "ntdll"
USER32 = "user32"
KERNEL32 = "kernel32"
RTL_GET_VERSION = "RtlGetVersion"
GET_SYSTEM_METRICS = "GetSystemMetrics"
GET_SYSTEM_INFO = "GetSystemInfo"

STATUS_SUCCESS = 0
SM_SERVERR2 = 89
