"""运行时设置与项目配置解析。"""
