"""
dev-cleanup - reclaim disk space from developer toolchain caches

This tool helps developers reclaim disk space by removing well-known cache
directories left behind by Gradle, Flutter, Node package managers, CocoaPods,
SwiftPM, pip, Homebrew, VS Code, Xcode and Docker.
"""

__version__ = "0.1.0"
