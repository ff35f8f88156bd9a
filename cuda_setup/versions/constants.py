"""Static version data for releases that predate the md5sum-driven layout."""

from typing import Dict, List

from .models import CudaLink

# First version this package can install.
START_SUPPORTED_CUDA_VERSION = "10.0"

# Installer links for these use a different naming scheme from 11.0 onwards.
OLD_CUDA_VERSIONS: List[str] = [
    "10.0",
    "10.1",
    "10.1.1",  # 10.1 update1
    "10.1.2",  # 10.1 update2
    "10.2",
]

CUDA_LINKS: Dict[str, CudaLink] = {
    # 10.0.130
    "10.0": CudaLink(
        md5sum_url="https://developer.download.nvidia.com/compute/cuda/10.0/Prod/docs/sidebar/md5sum.txt",
        linux_x86_url="http://developer.download.nvidia.com/compute/cuda/10.0/Prod/patches/1/cuda_10.0.130.1_linux.run",
        windows_url="https://developer.nvidia.com/compute/cuda/10.0/Prod/local_installers/cuda_10.0.130_411.31_win10",
    ),
    # 10.1.105
    "10.1": CudaLink(
        md5sum_url="https://developer.download.nvidia.com/compute/cuda/10.1/Prod/docs/sidebar/md5sum.txt",
        linux_x86_url="https://developer.nvidia.com/compute/cuda/10.1/Prod/local_installers/cuda_10.1.105_418.39_linux.run",
        windows_url="https://developer.nvidia.com/compute/cuda/10.1/Prod/local_installers/cuda_10.1.105_418.96_win10.exe",
    ),
    # 10.1.168
    "10.1.1": CudaLink(
        md5sum_url="https://developer.download.nvidia.com/compute/cuda/10.1/Prod/docs2/sidebar/md5sum-2.txt",
        linux_x86_url="https://developer.nvidia.com/compute/cuda/10.1/Prod/local_installers/cuda_10.1.168_418.67_linux.run",
        windows_url="https://developer.nvidia.com/compute/cuda/10.1/Prod/local_installers/cuda_10.1.168_425.25_win10.exe",
    ),
    # 10.1.243
    "10.1.2": CudaLink(
        md5sum_url="https://developer.download.nvidia.com/compute/cuda/10.1/Prod/docs3/sidebar/md5sum.txt",
        linux_x86_url="https://developer.download.nvidia.com/compute/cuda/10.1/Prod/local_installers/cuda_10.1.243_418.87.00_linux.run",
        windows_url="https://developer.download.nvidia.com/compute/cuda/10.1/Prod/local_installers/cuda_10.1.243_426.00_win10.exe",
    ),
    "10.2": CudaLink(
        md5sum_url="https://developer.download.nvidia.com/compute/cuda/10.2/Prod/docs/sidebar/md5sum2.txt",
        linux_x86_url="https://developer.download.nvidia.com/compute/cuda/10.2/Prod/patches/2/cuda_10.2.2_linux.run",
        windows_url="https://developer.download.nvidia.com/compute/cuda/10.2/Prod/local_installers/cuda_10.2.89_441.22_win10.exe",
    ),
}
