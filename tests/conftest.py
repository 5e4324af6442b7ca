import panda3d.core as p3d
import pytest

PRC_BASE = """
notify-level-ashikhminlut warning
"""

#pylint:disable=redefined-outer-name

@pytest.fixture
def prc_page(request):
    extra_prc = request.param if hasattr(request, 'param') else ''
    configpage = p3d.load_prc_file_data('', f'{PRC_BASE}\n{extra_prc}')
    yield configpage
    cpm = p3d.ConfigPageManager.get_global_ptr()
    cpm.delete_explicit_page(configpage)


@pytest.fixture
def outdir(tmp_path):
    return p3d.Filename.from_os_specific(str(tmp_path))
