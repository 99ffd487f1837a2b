"""领域层模型与错误。

包含：
- models: 配置、CLI 参数与网络绑定的数据模型。
- errors_list: 带编号的错误描述表。
- exceptions: BuidlerError 及其子类。
"""
