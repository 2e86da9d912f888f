from pydantic import BaseModel, ConfigDict, Field


class UploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "File uploaded successfully"
    url: str
    path: str
    upload_time: int = Field(alias="uploadTime")  # milliseconds


class DeleteUploadResponse(BaseModel):
    success: bool = True
    message: str = "File deleted successfully"
    path: str
