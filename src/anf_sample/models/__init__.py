from anf_sample.models.auth_info import AuthInfo, BasicInfo

__all__ = ["AuthInfo", "BasicInfo"]
