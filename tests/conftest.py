import pytest


@pytest.fixture
def dictpath(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join([
        'aahed',
        'aalii',
        'aargh',
        'zowie',
        'zorro',
        'morro',
        'light',
        'focus',
    ]) + '\n')
    return path
